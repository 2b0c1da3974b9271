import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", ""),
    "key": os.getenv("SUPABASE_KEY", ""),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

PWA_MANIFEST = {
    "name": os.getenv("PWA_NAME", "Shift Helper"),
    "short_name": os.getenv("PWA_SHORT_NAME", "Shifts"),
    "description": os.getenv("PWA_DESCRIPTION", "Simple staff shift scheduling"),
    "theme_color": os.getenv("PWA_THEME_COLOR", "#ffffff"),
}
