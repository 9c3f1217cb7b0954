"""
CleanCity configuration
Values are read once from the environment (and an optional .env file)
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Storage backend: 'file', 'mongodb' or 'memory'
STORAGE_BACKEND = os.getenv('CLEANCITY_STORAGE', 'file').strip().lower()
STORAGE_DIR = os.getenv('CLEANCITY_STORAGE_DIR', '.cleancity')

# MongoDB connection string from environment variable
MONGODB_URI = os.getenv('MONGODB_URI', 'mongodb://localhost:27017/')
DATABASE_NAME = os.getenv('DATABASE_NAME', 'cleancity')
STORAGE_COLLECTION = 'LocalStorage'

# Simulated latency for report submission (seconds)
SUBMIT_DELAY_SECONDS = float(os.getenv('CLEANCITY_SUBMIT_DELAY', '1.0'))

# Storage keys
REPORTS_KEY = 'waste-reports'
USERS_KEY = 'wm-users'
