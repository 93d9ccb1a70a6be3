import logging
logger: logging.Logger = logging.getLogger("earleychart")
logger.addHandler(logging.StreamHandler())
# Set to highest level, since we have some debug output amongst the code
# By default, we should not output any log messages
logger.setLevel(logging.CRITICAL)
