"""
History stage of the progress engine: record normalization, point building and gap segmentation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.history.records import normalize_records, to_record
from engine.history.builder import build_history, effective_start
from engine.history.gaps import segment_history

__all__ = ["normalize_records", "to_record", "build_history", "effective_start", "segment_history"]
