# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 Headstamp
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, see <https://www.gnu.org/licenses/>.
#  */
# -----------------------------------------------------------------------------

from pathlib import Path

from platformdirs import user_config_dir, user_log_path

APP_NAME = "headstamp"
ENV_APP_PREFIX = APP_NAME.upper() + "_"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

CONFIG_FILENAME = "headstampconfig.toml"

GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
LOCAL_CONFIG_FILE = Path(CONFIG_FILENAME)

# license templates
OWNER_PLACEHOLDER = "@@owner@@"
YEAR_PLACEHOLDER = "@@year@@"

LICENSE_ASSET_DIR = "licenses"
COPYRIGHT_SUFFIX = ".copyright"
HEADER_SUFFIX = ".header"

# permission bits used when a file's own mode cannot be read
DEFAULT_FILE_MODE = 0o660

DEFAULT_WORKERS = 8
DEFAULT_DETECTION_THRESHOLD = 0.8
DEFAULT_AMBIGUITY_MARGIN = 0.01
