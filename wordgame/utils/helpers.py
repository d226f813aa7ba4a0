"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract client identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = request_obj.remote_addr or 'unknown'

    return {
        'user_ip': user_ip,
        'player_id': request_obj.headers.get('X-Player-Id')
    }


def error_body(error_code: str, message: str, offending_word: Optional[str] = None) -> Dict:
    """Build an errorMessage payload for failures that are not TurnErrors."""
    body = {'errorCode': error_code, 'message': message}
    if offending_word is not None:
        body['offendingWord'] = offending_word
    return body
