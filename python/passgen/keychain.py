"""
Cross-platform keychain/keyring storage for generated passwords.

Supports secure password storage using:
- macOS: Keychain Access
- Windows: Windows Credential Store
- Linux: Secret Service API (GNOME Keyring, KWallet, etc.)
"""

import logging
import platform
from typing import Optional

import keyring
from keyring.errors import KeyringError, KeyringLocked, NoKeyringError, PasswordDeleteError

logger = logging.getLogger(__name__)


class KeychainManager:
    """Store generated passwords in the system keychain."""

    SERVICE_NAME = "com.passgen"

    def __init__(self, enabled: bool = True):
        """
        Initialize keychain manager.

        Args:
            enabled: Whether keychain integration is enabled
        """
        self.enabled = enabled
        self.platform = platform.system().lower()

        if self.enabled:
            self._ensure_keyring_available()

    def _ensure_keyring_available(self) -> None:
        """Ensure keyring backend is available and working."""
        try:
            backend = keyring.get_keyring()
            logger.debug(f"Using keyring backend: {backend}")

            if hasattr(backend, 'priority') and backend.priority < 1:
                logger.warning(f"Keyring backend {backend} may not be reliable")

        except (KeyringError, NoKeyringError) as e:
            logger.warning(f"Keyring not available: {e}")
            self.enabled = False

    def is_supported(self) -> bool:
        """Check if keychain is supported on current platform."""
        return self.enabled

    def get_backend_name(self) -> str:
        """Get platform-specific keychain information."""
        if not self.enabled:
            return "Keychain integration disabled"

        platform_info = {
            "darwin": "macOS Keychain Access",
            "windows": "Windows Credential Manager",
            "linux": "Linux Secret Service (GNOME Keyring/KWallet)"
        }

        backend_name = "Unknown"
        try:
            backend_name = keyring.get_keyring().__class__.__name__
        except KeyringError as e:
            logger.debug(f"Could not determine keyring backend: {e}")

        platform_name = platform_info.get(self.platform, f"Platform: {self.platform}")
        return f"{platform_name} ({backend_name})"

    def store_password(self, service: str, username: str, password: str) -> bool:
        """
        Store a password in the system keychain.

        Args:
            service: Service the password belongs to (e.g. "github.com")
            username: Account name within the service
            password: Password to store

        Returns:
            True if stored successfully, False otherwise
        """
        if not self.enabled:
            logger.debug("Keychain disabled, not storing password")
            return False

        try:
            keyring.set_password(service, username, password)
            logger.debug(f"Password stored in keychain for {username}@{service}")
            return True

        except KeyringLocked:
            logger.warning("Keychain is locked. Cannot store password.")
            return False
        except KeyringError as e:
            logger.error(f"Failed to store password in keychain: {e}")
            return False

    def get_password(self, service: str, username: str) -> Optional[str]:
        """
        Read a stored password.

        Args:
            service: Service the password belongs to
            username: Account name within the service

        Returns:
            The stored password, or None if missing or unavailable
        """
        if not self.enabled:
            return None

        try:
            return keyring.get_password(service, username)

        except KeyringLocked:
            logger.warning("Keychain is locked. Cannot read password.")
            return None
        except KeyringError as e:
            logger.error(f"Failed to read password from keychain: {e}")
            return None

    def delete_password(self, service: str, username: str) -> bool:
        """
        Remove a stored password.

        Args:
            service: Service the password belongs to
            username: Account name within the service

        Returns:
            True if deleted successfully, False otherwise
        """
        if not self.enabled:
            return False

        try:
            keyring.delete_password(service, username)
            logger.debug(f"Password deleted from keychain for {username}@{service}")
            return True

        except KeyringLocked:
            logger.warning("Keychain is locked. Cannot delete password.")
            return False
        except PasswordDeleteError as e:
            # Nothing stored under that name
            logger.debug(f"Could not delete password from keychain: {e}")
            return False
        except KeyringError as e:
            logger.error(f"Failed to delete password from keychain: {e}")
            return False

    def test_keychain_access(self) -> bool:
        """
        Test keychain access by storing, reading back and deleting a value.

        Returns:
            True if keychain is working, False otherwise
        """
        if not self.enabled:
            return False

        test_service = f"{self.SERVICE_NAME}.test"
        test_username = "test"
        test_password = "test_password_123"

        if not self.store_password(test_service, test_username, test_password):
            return False

        retrieved = self.get_password(test_service, test_username)
        self.delete_password(test_service, test_username)

        success = retrieved == test_password
        if success:
            logger.debug("Keychain access test passed")
        else:
            logger.warning("Keychain access test failed")

        return success


def get_keychain_manager(enabled: bool = True) -> KeychainManager:
    """
    Get a configured keychain manager instance.

    Args:
        enabled: Whether keychain integration should be enabled

    Returns:
        KeychainManager instance
    """
    return KeychainManager(enabled=enabled)
