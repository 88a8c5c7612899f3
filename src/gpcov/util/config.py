# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import os
import configparser

config = configparser.ConfigParser()

_package_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# shipped with the package, always read first
default_file = os.path.join(_package_dir, 'defaults.cfg')
# optional overrides: per installation, then per user
local_file = os.path.join(_package_dir, 'installation.cfg')
user_file = os.path.join(os.path.expanduser('~'), '.config', 'gpcov', 'user.cfg')

with open(default_file) as f:
    config.read_file(f)
config.read([local_file, user_file])

if not config.has_section('jitter'):
    raise ValueError("no [jitter] section in " + default_file + ", " + local_file + " or " + user_file)
