"""NeuralSync chat relay - serverless function.

The function host maps this file to ``/api/chat`` and serves the ASGI
``app`` below.
"""

from config import get_settings
from app import create_app

app = create_app(get_settings("serverless"))
