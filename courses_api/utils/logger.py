"""
Colored console logging and a function-call tracing decorator
"""
import os
import logging
import colorlog
import functools
import inspect
import time

from ..config import LOG_COLORS, LOG_DATE_FORMAT, LOG_FORMAT


class CustomLogger:
    """
    Custom logger class to handle detailed function logging with terminal output only
    """
    def __init__(self, name='courses_api.trace', level=logging.DEBUG):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        # Avoid stacking handlers when the module is reloaded
        if not any(isinstance(h, colorlog.StreamHandler) for h in self.logger.handlers):
            console_handler = colorlog.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(build_formatter())
            self.logger.addHandler(console_handler)

    def log_function_call(self, func):
        """Decorator to log function calls with timing and parameters"""
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            func_name = func.__qualname__
            file_name = inspect.getfile(func)

            self.logger.info(
                f"→ Entering {func_name} [{os.path.basename(file_name)}]"
            )

            if args or kwargs:
                params = []
                if args:
                    params.append(f"args: {args}")
                if kwargs:
                    params.append(f"kwargs: {kwargs}")
                self.logger.debug(f"Parameters: {', '.join(params)}")

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                execution_time = (time.time() - start_time) * 1000
                self.logger.info(
                    f"← Completed {func_name} in {execution_time:.2f}ms"
                )
                return result

            except Exception as e:
                execution_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"✕ Error in {func_name} after {execution_time:.2f}ms: "
                    f"{str(e)}", exc_info=True
                )
                raise

        return wrapper


def build_formatter():
    """Build the colored formatter shared by every console handler"""
    return colorlog.ColoredFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT, log_colors=LOG_COLORS)


def setup_logging(level=logging.INFO):
    """Configure colored logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level)
    if not any(isinstance(h, colorlog.StreamHandler) for h in logger.handlers):
        handler = colorlog.StreamHandler()
        handler.setFormatter(build_formatter())
        logger.addHandler(handler)


# Initialize the custom logger
custom_logger = CustomLogger()
