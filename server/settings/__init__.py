"""Django settings, assembled from components.

Components are loaded in order, so later files may override earlier ones.
The environment file is picked by ``DJANGO_ENV``.
"""

from os import environ

from split_settings.tools import include, optional

environ.setdefault('DJANGO_ENV', 'development')
_ENV = environ['DJANGO_ENV']

_base_settings = (
    'components/common.py',
    'components/logging.py',
    'components/storages.py',
    f'environments/{_ENV}.py',
    optional('environments/local.py'),
)

include(*_base_settings)
