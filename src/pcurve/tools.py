"""
Timing helpers reporting to the logging.info.
"""
from functools import wraps
import logging
import time


class catch_time:
    """
    Usage:
    with catch_time("sampling") as t:
        ...
    print(f"... time: {t}")
    """
    def __init__(self, msg):
        self.msg = msg
        logging.info(f"{msg} ...")

    def __enter__(self):
        self.t = time.perf_counter()
        return self

    def __exit__(self, type, value, traceback):
        self.t = time.perf_counter() - self.t
        logging.info(f"{self.msg} : T={str(self)}")

    def __str__(self):
        return f"{self.t:.4f} s"

    def __repr__(self):
        return str(self)


__report_indent_level = 0

def report(fn):
    """
    Log duration of every call of the decorated function, indented by the nesting level.
    """
    @wraps(fn)
    def do_report(*args, **kwargs):
        global __report_indent_level
        __report_indent_level += 1
        init_time = time.perf_counter()
        try:
            result = fn(*args, **kwargs)
        finally:
            __report_indent_level -= 1
        duration = time.perf_counter() - init_time
        indent = (__report_indent_level * 2) * " "
        logging.info(f"{indent}DONE {fn.__module__}.{fn.__name__} @ {duration}")
        return result
    return do_report
