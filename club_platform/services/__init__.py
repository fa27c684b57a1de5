"""Platform-owned workflow services.

These services are the import surface for the CLI and web clients.
"""

from .account_service import (
    check_credentials,
    find_account,
    login,
    register_account,
)
from .submission_service import (
    list_records,
    save_record,
    submit_record,
)
