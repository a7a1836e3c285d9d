# -*- coding: utf-8 -*-
"""
Application defaults. Any key can be overridden by a YAML/JSON file named in
the SHIFTBOARD_CONFIG environment variable or by ``create_app(test_config)``.
"""

CONFIG = {
    # SQLite file, relative paths are resolved inside the Flask instance folder
    "DATABASE": "shiftboard.sqlite",

    # Create tables on startup; seed demo employees when the table is empty
    "AUTO_INIT_DB": True,
    "SEED_DB": True,

    # Root log level: DEBUG | INFO | WARNING | ERROR
    "LOG_LEVEL": "INFO",
    "LOG_FORMAT": "%(asctime)s %(levelname)s %(name)s: %(message)s",
}

CONFIG_ENV_VAR = "SHIFTBOARD_CONFIG"
