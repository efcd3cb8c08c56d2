import threading
from typing import Dict

class Singleton(type):
    """
    One instance per class, built by the first call with that call's arguments.
    Logger uses it so every module logs through the handlers main() configured;
    reset() drops the instance so AppConfig.build_logger() can rebuild it.
    """
    _instances: Dict[type, object] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwds):
        if cls not in Singleton._instances:
            with Singleton._lock:
                if cls not in Singleton._instances:
                    Singleton._instances[cls] = super().__call__(*args, **kwds)
        return Singleton._instances[cls]

    def reset(cls) -> None:
        with Singleton._lock:
            Singleton._instances.pop(cls, None)
