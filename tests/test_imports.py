def test_import_skirmish_package() -> None:
    import importlib

    module = importlib.import_module("skirmish")
    assert module.__version__


def test_import_services_no_side_effects() -> None:
    from skirmish.services import BattleActionService, LevelingService

    assert BattleActionService() is not None
    assert LevelingService() is not None


def test_get_logger_leaves_logging_unconfigured() -> None:
    import logging

    import structlog

    from skirmish.core.logging_config import get_logger

    structlog.reset_defaults()
    package_logger = logging.getLogger("skirmish")
    handlers_before = list(package_logger.handlers)

    get_logger("skirmish.services.battle_service")

    assert not structlog.is_configured()
    assert package_logger.handlers == handlers_before
