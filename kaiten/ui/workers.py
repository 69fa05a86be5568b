"""认证请求后台 Worker（QThread）：网络调用在后台线程，结果经信号回到界面线程。"""
import sys
from typing import Callable, Dict, Optional

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from kaiten.auth.models import AuthResult


class AuthWorker(QThread):
    """执行一次认证请求（只调 AuthClient，不改会话状态）。"""
    finished_result = pyqtSignal(str, object)  # 动作名, AuthResult

    def __init__(self, action: str, job: Callable[[], AuthResult]):
        super().__init__()
        self._action = action
        self._job = job

    def run(self) -> None:
        self.finished_result.emit(self._action, self._job())


class AuthActions(QObject):
    """按动作名管理 Worker：同一动作同时只有一个请求在途，重复触发直接忽略。"""

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._workers: Dict[str, AuthWorker] = {}
        self._callbacks: Dict[str, Callable[[AuthResult], None]] = {}

    def is_running(self, action: str) -> bool:
        worker = self._workers.get(action)
        return worker is not None and worker.isRunning()

    def run(self, action: str, job: Callable[[], AuthResult], on_done: Callable[[AuthResult], None]) -> bool:
        """启动后台请求；该动作已有请求在途时返回 False。"""
        if self.is_running(action):
            print(f"[kaiten-ui] {action} 请求进行中，忽略重复触发", file=sys.stderr, flush=True)
            return False
        worker = AuthWorker(action, job)
        # 槽函数属于本对象（界面线程），信号自动排队回到界面线程
        worker.finished_result.connect(self._on_finished)
        self._workers[action] = worker
        self._callbacks[action] = on_done
        worker.start()
        return True

    def _on_finished(self, action: str, result: AuthResult) -> None:
        callback = self._callbacks.pop(action, None)
        worker = self._workers.pop(action, None)
        if worker is not None:
            worker.wait()
            worker.deleteLater()
        if callback is not None:
            callback(result)
