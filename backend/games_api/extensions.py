from flask_cors import CORS
from flask_socketio import SocketIO

cors = CORS()
# threading: Werkzeug раздаёт каждый запрос своему потоку
socketio = SocketIO(async_mode="threading")
