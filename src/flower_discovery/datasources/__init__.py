"""External data sources that back the provider protocols.

One subpackage per source::

    datasources/{name}/
    ├── __init__.py       # public API re-exports
    ├── client.py         # URLs and constants
    └── {feature}.py      # provider classes / fetch functions

Providers use ``services.http.session`` and translate transport errors into
``ProviderFailure`` subclasses so discovery can degrade gracefully.
"""
