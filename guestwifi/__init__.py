"""Guest WiFi captive-portal registration service."""
