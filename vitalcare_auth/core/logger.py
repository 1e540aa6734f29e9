import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_DEFAULT_HANDLERS = ['console', ]

# Конфигурация логирования клиента; подключается в core.config через dictConfig
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': LOG_FORMAT
        },
        'short': {
            'format': '%(levelname)s: %(message)s'
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'vitalcare_auth': {
            'handlers': LOG_DEFAULT_HANDLERS,
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'httpx': {
            'handlers': LOG_DEFAULT_HANDLERS,
            'level': 'WARNING',
            'propagate': False,
        },
    },
    'root': {
        'level': LOG_LEVEL,
        'formatter': 'verbose',
        'handlers': LOG_DEFAULT_HANDLERS,
    },
}
