from .vietqr import BankAccount, build_vietqr_url, encode_uri_component, round_half_up, transfer_note

__all__ = ['BankAccount', 'build_vietqr_url', 'encode_uri_component', 'round_half_up', 'transfer_note']
