import os

def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    # Mặc định trả về Development cho tất cả các trường hợp còn lại
    return "config.development"


def day_names_from_env(default):
    """DAY_NAMES="Chủ nhật,Thứ 2,...,Thứ 7" overrides the weekday table (Sunday first)."""
    raw = os.getenv("DAY_NAMES")
    if not raw:
        return tuple(default)
    return tuple(part.strip() for part in raw.split(","))
