"""
Settings for repoinfo.

These settings are global and can be accessed from any module in the repoinfo package.

The SETTINGS dict structure follows the structure of repoinfo submodules.

Expected usage behavior:

```python
from repoinfo.settings import SETTINGS

CLIENT_SETTINGS = SETTINGS.http.client
```

Once initialized, the settings are expected to be immutable (not enforced).
"""

SETTINGS = {
    'http': {
        'client': {
            'headers': {
                "User-Agent": "repoinfo/0.1",
                "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
            },
        },
    },
    'runner': {
        'default_url': "https://api.github.com/repos/MaksimenkoPG/ruby_app_boilerplate",
        # Environment variable read by the CLI when no url argument is given
        'url_env_var': "URL",
    },
}


class AttrDict(dict):
    """
    A dictionary subclass that allows dot-notation access while 
    recursively converting nested dictionaries.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.__dict__ = self
        for key, value in self.items():
            self[key] = self._convert(value)

    @classmethod
    def _convert(cls, value):
        if isinstance(value, dict):
            return cls(value)
        return value

    def __setitem__(self, key, value):
        super().__setitem__(key, self._convert(value))

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError as exc:
            raise AttributeError(f"AttrDict object has no attribute '{key}'") from exc


SETTINGS = AttrDict(SETTINGS)
CLIENT_SETTINGS = SETTINGS.http.client
RUNNER_SETTINGS = SETTINGS.runner
