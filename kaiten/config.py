"""客户端全局配置与路径。"""
import os
from pathlib import Path

# 项目根目录（kaiten 包所在目录的上一级）
ROOT_DIR = Path(__file__).resolve().parent.parent
# 数据目录：令牌、主题、引导标记等本地偏好
DATA_DIR = ROOT_DIR / "data"
PREFS_DIR = DATA_DIR / "prefs"
PREFS_FILE = PREFS_DIR / "preferences.json"
ASSETS_DIR = ROOT_DIR / "assets"

# 后端接口
API_BASE_URL = os.environ.get("KAITEN_API_BASE_URL", "http://127.0.0.1:7000").strip().rstrip("/")
REQUEST_TIMEOUT = float(os.environ.get("KAITEN_REQUEST_TIMEOUT", "15"))

# 持久化键名
TOKEN_KEY = "userToken"
THEME_KEY = "selectedTheme"
ONBOARDING_KEY = "didCompleteOnboarding"

# 窗口默认
WINDOW_WIDTH = 420
WINDOW_HEIGHT = 640
APP_TITLE = "Kaiten"


def ensure_dirs() -> None:
    """确保数据目录存在。"""
    for d in (DATA_DIR, PREFS_DIR):
        d.mkdir(parents=True, exist_ok=True)
