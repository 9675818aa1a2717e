"""
Engine Packages for Zenshin Progress Engine

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.models import GAP, ForecastLine, Gap, PaceSample, Point, ProgressRecord, ProgressReport, SmoothingRegime
from engine.pipeline import PipelineOptions, run_pipeline

__all__ = [
    "GAP", "ForecastLine", "Gap", "PaceSample", "Point", "ProgressRecord", "ProgressReport",
    "SmoothingRegime", "PipelineOptions", "run_pipeline",
]
