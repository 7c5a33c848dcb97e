"""
timeengine - midnight-safe time entry segmentation and hour-type classification.
"""

__version__ = "0.1.0"
