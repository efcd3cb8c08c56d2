from __future__ import annotations
from abstract.creator.abstract_creator import Creator
from abstract.creator.concrete_creator_one import ConcreteCreator1
from abstract.creator.concrete_creator_two import ConcreteCreator2
from utils.config import AppConfig
from utils.logger import Logger
import sys


def client_code(creator: Creator) -> None:
    # Only the Creator interface is known here
    print(creator.some_operation())


def main() -> int:
    AppConfig.load().build_logger()

    creator1 = ConcreteCreator1()
    creator2 = ConcreteCreator2()

    client_code(creator1)
    client_code(creator2)

    Logger().info("Demo finished")
    return 0


def run() -> None:
    try:
        status = main()
    except Exception as e:
        Logger().critical("Fatal error: %s", e, exc_info=True)
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    run()
