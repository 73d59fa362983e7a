# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


from .document import Document
