"""Environment-based configuration settings"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Environment settings
ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')

# Server binding
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '4567'))

DEBUG = ENVIRONMENT == 'development'
