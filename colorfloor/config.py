from dotenv import load_dotenv

import os

load_dotenv()

SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "120"))
BROADCAST_URL = os.getenv("BROADCAST_URL", "memory://")
ARENA_CHANNEL = "arena"
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

DEV = os.environ.get("DEV", "true").lower() == "true"
SQLITE_URL = os.environ.get("SQLITE_URL", "sqlite:///./colorfloor.db")
POSTGRES_URL = os.environ.get("POSTGRES_URL")

MAP_PATH = os.environ.get("MAP_PATH")
RUN_SESSION_LOOP = os.environ.get("RUN_SESSION_LOOP", "true").lower() == "true"

# Round pacing, all in seconds
INITIAL_TARGET_INTERVAL = float(os.getenv("INITIAL_TARGET_INTERVAL", "5"))
MIN_TARGET_INTERVAL = float(os.getenv("MIN_TARGET_INTERVAL", "2"))
INTERVAL_DECREASE_PER_TICK = float(os.getenv("INTERVAL_DECREASE_PER_TICK", "0.5"))
INTERMISSION_DURATION = int(os.getenv("INTERMISSION_DURATION", "10"))
POST_ROUND_DELAY = float(os.getenv("POST_ROUND_DELAY", "2"))
PLACEMENT_SETTLE_DELAY = float(os.getenv("PLACEMENT_SETTLE_DELAY", "0.15"))

# Fraction of pads showing the target color
START_TARGET_FRACTION = float(os.getenv("START_TARGET_FRACTION", "0.3"))
FRACTION_DECREASE_PER_ROUND = float(os.getenv("FRACTION_DECREASE_PER_ROUND", "0.05"))
MIN_TARGET_FRACTION = float(os.getenv("MIN_TARGET_FRACTION", "0.1"))

# World units added to the mean pad distance before capping a pad's weight
DISTANCE_CAP_MARGIN = float(os.getenv("DISTANCE_CAP_MARGIN", "12"))
