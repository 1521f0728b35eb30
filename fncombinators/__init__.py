"""fncombinators - pure function combinators for left-to-right pipelines.

```python
from toolz import compose_left
from fncombinators import adding, greater_than, when

cap_and_shift = compose_left(when(greater_than(100), lambda _: 100), adding(1))
```
"""

from .combinators import *  # noqa: F403
from .combinators import __all__
from .config import configure_library_logging

configure_library_logging()

__version__ = "0.1.0"
