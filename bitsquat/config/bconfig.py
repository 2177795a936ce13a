# bconfig.py

import os
import re


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Default values for environment-based configurations
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING').upper()
PERMUTATE_EXTENSION_DEFAULT = _env_flag('BITSQUAT_EXTENSION_TOO')
STRICT_VARIANTS_DEFAULT = _env_flag('BITSQUAT_STRICT')
OUTPUT_FORMAT_DEFAULT = os.environ.get('BITSQUAT_OUTPUT_FORMAT', 'list').lower()

# Other constants
PROGRAM_NAME = 'Bitsquat'
VERSION = '0.1.0'
BYTE = 8
MAX_DOMAIN_LENGTH = 253
OUTPUT_FORMATS = ('list', 'json', 'csv')
VALID_FQDN_REGEX = re.compile(r'(?=^.{4,253}$)(^((?!-)[a-z0-9-]{1,63}(?<!-)\.)+[a-z0-9-]{2,63}$)')
