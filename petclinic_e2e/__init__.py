"""
Pet-clinic End-to-End Testing Suite

REST API and browser journeys against a deployed pet-clinic backend
(Spring REST) and frontend (Angular).
"""

__version__ = "1.0.0"
