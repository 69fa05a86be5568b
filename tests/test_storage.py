"""本地键值文件与订阅测试。"""
import tempfile
from pathlib import Path

from kaiten.events import Subscribers
from kaiten.storage import KeyValueFile


def test_values_survive_reload() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "nested" / "prefs.json"
        kv = KeyValueFile(path)
        kv.set("userToken", "abc")
        kv.set("didCompleteOnboarding", True)
        again = KeyValueFile(path)
        assert again.get_str("userToken") == "abc"
        assert again.get_bool("didCompleteOnboarding") is True


def test_typed_getters_ignore_wrong_types() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        kv = KeyValueFile(Path(tmp) / "prefs.json")
        kv.set("userToken", 42)
        kv.set("didCompleteOnboarding", "yes")
        assert kv.get_str("userToken") == ""
        assert kv.get_bool("didCompleteOnboarding") is False
        assert kv.get("missing", "x") == "x"


def test_subscribers_can_unsubscribe_during_notify() -> None:
    subs: Subscribers[str] = Subscribers()
    calls = []

    def once(source: str) -> None:
        calls.append(source)
        unsubscribe()

    unsubscribe = subs.subscribe(once)
    subs.subscribe(calls.append)
    subs.notify("a")
    subs.notify("b")
    assert calls == ["a", "a", "b"]
    assert len(subs) == 1
