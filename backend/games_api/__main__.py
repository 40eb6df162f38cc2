from games_api import config_from_env, create_app, socketio


def main() -> None:
    app = create_app(config_from_env())
    socketio.run(
        app,
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.config["DEBUG"],
        use_reloader=False,  # one process, one store
        allow_unsafe_werkzeug=True,
    )


if __name__ == "__main__":
    main()
