from shortenerclient.models.session_model import SessionModel, is_session_valid
from shortenerclient.models.link_record_model import LinkRecordModel


__all__ = [
    'SessionModel',
    'is_session_valid',
    'LinkRecordModel',
]
