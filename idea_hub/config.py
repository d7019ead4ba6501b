import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    '''Base configuration'''
    try:
        SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
        DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
        PORT = int(os.getenv('PORT', '5000'))
        LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

        # Data backend
        BACKEND_API_URL = os.getenv('BACKEND_API_URL', 'http://localhost:3000')
        HTTP_DEFAULT_TIMEOUT = float(os.getenv('HTTP_DEFAULT_TIMEOUT', '10'))

        # Declared maximum date of birth on the contact form (yyyy-mm-dd).
        # Empty means the form's built-in fallback.
        CONTACT_DOB_MAX = os.getenv('CONTACT_DOB_MAX', '')
    except Exception as e:
        raise RuntimeError(f"Configuration error: {str(e)}")


class TestConfig(Config):
    '''Test configuration'''
    TESTING = True
    BACKEND_API_URL = 'http://backend.test'
    CONTACT_DOB_MAX = ''


config = {
    'development': Config,
    'testing': TestConfig,
    'default': Config,
}
