from usercache.cache.shared_user_store import get_shared_user_store
from usercache.infra.configuration import Config
from usercache.infra.logging_setup import get_logger, init_logging_from_config
from usercache.operation.demo import run_demo


def main():
    config = Config()
    init_logging_from_config(config)
    log = get_logger(__name__)
    log.info("Logging initialized")

    shared_store = get_shared_user_store()
    run_demo(
        shared_store,
        production_names=config.getarray("demo", "production_users"),
        mock_names=config.getarray("demo", "mock_users"),
    )
    log.info(f"Shared store holds {len(shared_store)} users")


if __name__ == "__main__":
    main()
