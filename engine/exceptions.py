"""
Exceptions raised by the progress engine when its inputs break a precondition.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


class ProgressError(Exception):
    pass


class EmptyHistoryError(ProgressError):
    pass


class InsufficientHistoryError(ProgressError):
    pass


class GapInHistoryError(ProgressError, ValueError):
    pass


class MalformedRecordError(ProgressError):
    pass


class MalformedTimestampError(MalformedRecordError):
    pass
