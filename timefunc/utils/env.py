import os


def get_log_level() -> str:
    """@brief Return the root logging level name.

    @return Level from `LOG_LEVEL` (default `INFO`), upper-cased.
    """
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_series_data_folder() -> str:
    """@brief Return folder path used to persist series artifacts.

    @return Folder from `SERIES_DATA_FOLDER`, otherwise `./data/series`.
    """
    return os.getenv("SERIES_DATA_FOLDER", "").strip() or "./data/series"


def get_plot_folder() -> str:
    """@brief Return folder path where rendered charts are written.

    @return Folder from `PLOT_FOLDER`, otherwise `./images`.
    """
    return os.getenv("PLOT_FOLDER", "").strip() or "./images"
