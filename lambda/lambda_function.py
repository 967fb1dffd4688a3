"""
Entry point da AWS Lambda (handler: lambda_function.lambda_handler)

Rotas e composição dos adapters ficam em
infrastructure.adapters.input.lambda_handler
"""
from infrastructure.adapters.input.lambda_handler import app, lambda_handler

__all__ = ['app', 'lambda_handler']
