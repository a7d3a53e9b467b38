import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SESSION_SECRET = "local-session-secret"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./site.db")

    AUTH_PASSWORD = os.getenv("AUTH_PASSWORD")
    SESSION_SECRET = os.getenv("SESSION_SECRET", DEFAULT_SESSION_SECRET)
    SESSION_COOKIE = "admin_session"
    SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 7 days
    SESSION_COOKIE_SECURE = _env_bool("SESSION_COOKIE_SECURE", False)

    MAINSTREET_URL = os.getenv("MAINSTREET_URL", "https://app.mainstreetsites.com/dmn2417/classes.aspx")
    MAINSTREET_BASE_URL = os.getenv("MAINSTREET_BASE_URL", "https://app.mainstreetsites.com/dmn2417/")
    DEFAULT_SESSION_NAME = "Spring 2026"

    SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
    SLACK_CHANNEL_JOB_STATUS = os.getenv("SLACK_CHANNEL_JOB_STATUS")
    SLACK_MENTIONS = os.getenv("SLACK_MENTIONS")

    # Sent with the MainStreet fetch; the site rejects requests that don't look like a browser
    BROWSER_HEADERS = {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
    }

config = Config()
