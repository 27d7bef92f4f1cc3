import logging

from timefunc.utils.env import get_log_level


def configure_logging() -> None:
    """@brief Configure root logging from `LOG_LEVEL`.

    @note Unknown level names fall back to `INFO`.
    """
    level = logging.getLevelName(get_log_level())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
