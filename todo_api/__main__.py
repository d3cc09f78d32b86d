"""Run the API server: ``python -m todo_api``."""
from todo_api.config import get_settings
from todo_api.logging_config import configure_logging
from todo_api.server import TodoServer


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    TodoServer(settings=settings).run()


if __name__ == "__main__":
    main()
