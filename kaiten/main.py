"""客户端入口：读取本地偏好与令牌 → 引导 / 登录 / 主界面。"""
import sys

from PyQt6.QtWidgets import QApplication

from kaiten import __version__
from kaiten.auth.client import AuthClient
from kaiten.auth.session import SessionStore
from kaiten.config import APP_TITLE, ensure_dirs
from kaiten.prefs.store import PreferenceStore
from kaiten.storage import KeyValueFile
from kaiten.ui.window import AppWindow


def main() -> None:
    ensure_dirs()
    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    app.setApplicationVersion(__version__)

    # 令牌、主题、引导标记共用一个本地偏好文件
    storage = KeyValueFile()
    prefs = PreferenceStore(storage)
    client = AuthClient()
    session = SessionStore(client, storage)

    window = AppWindow(prefs, session)
    window.show()
    window.restore_session()

    code = app.exec()
    client.close()
    sys.exit(code)


if __name__ == "__main__":
    main()
