"""
# LowC: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

HEAD_OPENING_TAG = '<head>'
HEADER_BLOCK = '''
<meta charset="UTF-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0" />
<meta http-equiv="X-UA-Compatible" content="IE=edge" />
<!-- Prevent automatic translation -->
<meta name="googlebot" content="notranslate" />
'''

MENTION_CLASS_NAME = 'mention'

CONFIG_DIRECTORY_NAME = 'lowc'
MENTION_CONFIG_FILE_NAME = 'mentions.toml'
