# pattern_demos/config/defaults.py
from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": "${LOG_LEVEL:WARNING}",
        "destination": "${LOG_DESTINATION:console}",
        "file": {
            "path": "${PATTERN_DEMOS_LOGDIR:logs}/pattern_demos.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Console narration
    "display": {
        "separator_width": 48,
        "separator_char": "-",
        "section_width": 32,
        "divider": "--------------+-+-+------------------",
    },

    # Bank account proxy demo
    "proxy": {
        "withdrawal_limit": 1000,
    },

    # Singleton database demo
    "singleton": {
        "connection_string": "${DATABASE_URL:mongodb://localhost:27017/mydb}",
    },

    "output_format": "${PATTERN_DEMOS_FORMAT:table}",
}
