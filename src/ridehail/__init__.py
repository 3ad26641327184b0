"""
Ridehail Backend - rider/captain platform API

Request authentication gate, captain registration and the HTTP bootstrap
for the ride-hailing backend.
"""

__version__ = "1.0.0"
