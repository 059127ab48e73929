import os
from dotenv import load_dotenv
load_dotenv()

ES_URL = os.getenv("ES_URL", "http://127.0.0.1:9200")
ES_CONNECT_TIMEOUT = float(os.getenv("ES_CONNECT_TIMEOUT", "0"))
ES_DEADLINE = float(os.environ["ES_DEADLINE"]) if os.getenv("ES_DEADLINE") else None
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
