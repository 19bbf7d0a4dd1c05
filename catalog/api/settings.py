import os
import json

CONFIG_PATH = os.getenv(
    "CATALOG_CONFIG",
    os.path.join(os.path.dirname(__file__), "config", "server.json"),
)

config_data = {}
if os.path.exists(CONFIG_PATH):
    with open(CONFIG_PATH) as f:
        config_data = json.load(f)

MONGODB_URI = os.getenv("MONGODB_URI", config_data.get("MONGODB_URI", "mongodb://localhost:27017"))
MONGODB_DB = os.getenv("MONGODB_DB", config_data.get("MONGODB_DB", "library"))
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", config_data.get("MONGO_TIMEOUT_MS", 5000)))

JWT_SECRET = os.getenv("JWT_SECRET", config_data.get("JWT_SECRET", "changeme-local-dev"))
ALGORITHM = os.getenv("JWT_ALG", config_data.get("JWT_ALG", "HS256"))
# 0 => tokens carry no exp claim and never expire
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", config_data.get("TOKEN_TTL_SECONDS", 0)))

LOGIN_SECRET = os.getenv("LOGIN_SECRET", config_data.get("LOGIN_SECRET", "secret"))

# debug adds stack traces and resolver locals to GraphQL error responses
DEBUG = os.getenv("DEBUG", str(config_data.get("DEBUG", "0"))) == "1"
