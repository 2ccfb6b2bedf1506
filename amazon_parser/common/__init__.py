# Common utilities
from .config_loader import ParserConfig, load_config, load_parser_config
from .log_config import setup_logging
from .text_utils import clean_text, truncate
