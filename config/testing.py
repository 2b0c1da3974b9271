SECRET_KEY = "test-secret"

SUPABASE_CONFIG = {
    "url": "http://localhost:54321",
    "key": "test-key",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CORS_ORIGINS = ["http://localhost:5173"]

SESSION_DAYS = 1

PWA_MANIFEST = {
    "name": "Shift Helper (test)",
    "theme_color": "#000000",
}
