import os
import logging
import logging.handlers
import colorlog
from typing import Any, Dict, Optional

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

class Logger:
    """
    Logging setup for applications that use BlockTimer.
    Timer lines are written at DEBUG, so the handlers default to DEBUG.
    """

    @staticmethod
    def setup(
        app_name: str,
        console_enabled: bool = True,
        console_level: str = "DEBUG",
        file_enabled: bool = False,
        file_level: str = "DEBUG",
        log_dir: str = "logs",
        log_filename: Optional[str] = None,
        console_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        file_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        date_format: str = "%Y-%m-%d %H:%M:%S",
        file_date_format: Optional[str] = None,
        max_bytes: int = 10485760,  # 10MB
        backup_count: int = 5,
        additional_loggers: Dict[str, str] = None
    ) -> logging.Logger:
        """
        Set up logging with console and file handlers.

        Args:
            app_name: Name of the application (used for logger name and default filename)
            console_enabled: Whether to log to the console
            console_level: Logging level for console output
            file_enabled: Whether to log to a rotating file
            file_level: Logging level for file output
            log_dir: Directory to store log files
            log_filename: Name of the log file (defaults to app_name.log)
            console_format: Format string for console logs
            file_format: Format string for file logs
            date_format: Date format for console log timestamps
            file_date_format: Date format for file log timestamps (defaults to date_format)
            max_bytes: Maximum size of log file before rotation
            backup_count: Number of backup log files to keep
            additional_loggers: Dict of logger names and their levels to configure

        Returns:
            The application logger
        """
        # Clear any existing handlers
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

        levels = []

        if console_enabled:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(getattr(logging, console_level.upper()))
            console_handler.setFormatter(colorlog.ColoredFormatter(
                fmt='%(log_color)s' + console_format,
                datefmt=date_format,
                reset=True,
                log_colors=LOG_COLORS
            ))
            root_logger.addHandler(console_handler)
            levels.append(console_handler.level)

        log_path = None
        if file_enabled:
            if log_filename is None:
                log_filename = f"{app_name.lower().replace(' ', '_')}.log"

            os.makedirs(log_dir, exist_ok=True)
            log_path = os.path.join(log_dir, log_filename)

            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(getattr(logging, file_level.upper()))
            file_handler.setFormatter(logging.Formatter(
                fmt=file_format,
                datefmt=file_date_format or date_format
            ))
            root_logger.addHandler(file_handler)
            levels.append(file_handler.level)

        # Root level is the lowest level of any enabled handler
        root_logger.setLevel(min(levels) if levels else logging.CRITICAL)

        if additional_loggers:
            for logger_name, level in additional_loggers.items():
                logging.getLogger(logger_name).setLevel(getattr(logging, level.upper()))

        logger = logging.getLogger(app_name)
        logger.info(f"Logging initialized for {app_name}")
        if log_path:
            logger.info(f"Log file: {log_path}")

        return logger

    @staticmethod
    def setup_from_config(app_name: str, config: Any) -> logging.Logger:
        """
        Set up logging using configuration from a Config object.

        Args:
            app_name: Name of the application
            config: Configuration object with logging settings

        Returns:
            The configured logger
        """
        console_config = config.logging.console
        file_config = config.logging.file

        return Logger.setup(
            app_name=app_name,
            console_enabled=console_config.enabled,
            console_level=console_config.level,
            file_enabled=file_config.enabled,
            file_level=file_config.level,
            log_dir=file_config.log_dir,
            log_filename=file_config.filename,
            console_format=console_config.format,
            file_format=file_config.format,
            date_format=console_config.date_format,
            file_date_format=file_config.date_format,
            max_bytes=file_config.max_bytes,
            backup_count=file_config.backup_count,
            additional_loggers=config.logging.additional_loggers
        )
