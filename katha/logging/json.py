from datetime import datetime, timezone
import json
import logging
import pathlib
import traceback


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            # records from outside katha don't carry a caller
            caller = getattr(obj, 'caller', None)
            if caller is None:
                path_name, line_number, function_name, module = (
                    obj.pathname,
                    obj.lineno,
                    obj.funcName,
                    obj.module,
                )
            else:
                path_name, line_number, function_name = (
                    caller.filename,
                    caller.lineno,
                    caller.function,
                )
                module = caller.frame.f_globals.get('__name__', obj.module)
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                'level_name': obj.levelname,
                'path_name': path_name,
                'file_name': pathlib.Path(path_name).name,
                'module': module,
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': line_number,
                'function_name': function_name,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
                'thread': obj.thread,
                'process': obj.process,
            }
        return super().default(obj)


class JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)
