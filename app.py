"""Games API – in-memory CRUD service over a keyed game store.

Run from the repository root (after `pip install -e .`)::

    python app.py

Bind address, port, seed file and log level come from the environment,
see ``games_api/config.py``.
"""

from games_api.__main__ import main

if __name__ == "__main__":
    main()
