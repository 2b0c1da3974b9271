import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", "http://localhost:54321"),
    "key": os.getenv("SUPABASE_KEY", ""),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Front-end dev server origins
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if o.strip()
]

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

PWA_MANIFEST = {
    "name": os.getenv("PWA_NAME", "Shift Helper (dev)"),
    "short_name": os.getenv("PWA_SHORT_NAME", "Shifts"),
}
