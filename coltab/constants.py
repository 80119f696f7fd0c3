import os

DEFAULT_LINE_END = '\n'
CRLF_LINE_END = '\r\n'

DEFAULT_DELIMITER = '\t'
DEFAULT_HEADING_PREFIX = '# '

WIDTH_STRATEGY = os.environ.get('COLTAB_WIDTH', 'unicode')

LOG_FORMAT = '{asctime}:{levelname}:{name}:{message}'
LOG_DATE_FORMAT = '%d-%m-%Y %H:%M:%S'
