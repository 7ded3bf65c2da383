# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import collections


class Logs:
    """In-memory store of the latest log messages.

    Every message passed to print_d/print_w/print_e ends up here, tagged
    with its category ("debug", "warnings", "errors"), even if it wasn't
    printed. The test suite dumps the content for failing tests.
    """

    MAX_LOG_SIZE_DEFAULT = 500

    def __init__(self, max_log_size=MAX_LOG_SIZE_DEFAULT):
        self._log = collections.deque(maxlen=max_log_size)

    def log(self, string, category=None):
        """Log str or bytes"""

        self._log.append((category, string))

    def clear(self):
        """Remove all entries"""

        self._log.clear()

    def get_content(self, category=None, limit=None):
        """Get a list of str for the specified category, oldest first.

        Passing no category will return all content. If `limit` is
        given only the last `limit` entries are returned.
        """

        content = []
        for cat, string in list(self._log):
            if category is None or category == cat:
                if isinstance(string, bytes):
                    string = string.decode("utf-8", "replace")
                content.append(string)

        if limit is not None:
            assert limit > 0
            return content[-limit:]
        return content


_logs = Logs()
log = _logs.log
get_content = _logs.get_content
