import logging
import sys

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger("civic")
    if logger.handlers:
        logger.setLevel(level)
        return logger  # already configured
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    # access logs are noisy for a JSON API
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logger
