import logging
from logging.handlers import RotatingFileHandler
import os


def setup_logging(log_dir=None, level=logging.INFO):
    # Formatter cho cả file và console
    log_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # --- Logger gốc ---
    app_logger = logging.getLogger()
    app_logger.setLevel(level)

    # Console handler (tránh add lặp)
    if not any(type(h) is logging.StreamHandler for h in app_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(log_formatter)
        app_logger.addHandler(console_handler)

    # Không có thư mục log (ví dụ khi chạy test) thì chỉ log ra console
    if log_dir:
        log_dir = os.path.abspath(log_dir)
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, "app.log")

        # File handler (tránh add lặp)
        if not any(
            isinstance(h, RotatingFileHandler) and h.baseFilename == log_file
            for h in app_logger.handlers
        ):
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5
            )
            file_handler.setFormatter(log_formatter)
            app_logger.addHandler(file_handler)

    # Đảm bảo Flask không tự động double-log
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


# --- Chạy hàm này 1 lần ở entrypoint (app_factory.create_app) ---
