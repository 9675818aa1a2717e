"""
Forecasting logic for level completion, projecting exponentially smoothed time-per-level averages forward to the target level under a fast-reacting and a slow-reacting regime.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.completion import default_regimes, forecast_completion, smoothed_hours_per_level

__all__ = ["default_regimes", "forecast_completion", "smoothed_hours_per_level"]
