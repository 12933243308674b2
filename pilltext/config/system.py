"""
System-Wide Configuration
"""

import os

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv('PILLTEXT_LOG_LEVEL', 'INFO').upper()  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
