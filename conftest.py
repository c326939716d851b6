"""
Root conftest.py - puts the project root on sys.path so tests import
``ray_tracer`` from the working tree without an install.
"""
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
