from contextlib import contextmanager

import term_spin


@contextmanager
def reset_default_interval():
    interval = term_spin._default_interval
    try:
        yield
    finally:
        term_spin._default_interval = interval
