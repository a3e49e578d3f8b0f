# lifepulse/database_types.py
import json
from cryptography.fernet import Fernet
from sqlalchemy.types import TypeDecorator, LargeBinary

from .config import settings

# --- Encryption Setup ---
cipher_suite = Fernet(settings.ENCRYPTION_KEY.encode())


class EncryptedJSON(TypeDecorator):
    """
    A custom SQLAlchemy type to transparently encrypt and decrypt JSON data.

    Used for health details that should not sit in the database as plain text,
    such as the side effects recorded with a medicine scan.
    """
    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value, dialect):
        """Serialises the value to JSON and encrypts it before storage."""
        if value is not None:
            byte_data = json.dumps(value).encode('utf-8')
            return cipher_suite.encrypt(byte_data)
        return value

    def process_result_value(self, value, dialect):
        """Decrypts the stored bytes and loads the JSON payload."""
        if value is not None:
            json_string = cipher_suite.decrypt(value).decode('utf-8')
            return json.loads(json_string)
        return value
