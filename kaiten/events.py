"""变更通知：显式订阅 / 取消订阅，替代界面框架的隐式观察。"""
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")


class Subscribers(Generic[T]):
    """回调列表。状态变更后由持有者调用 notify，回调收到持有者本身。"""

    def __init__(self) -> None:
        self._callbacks: List[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """注册回调，返回取消订阅函数。"""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def notify(self, source: T) -> None:
        # 复制一份，回调里取消订阅不影响本轮遍历
        for callback in list(self._callbacks):
            callback(source)

    def __len__(self) -> int:
        return len(self._callbacks)
