"""Request dispatch, error classification and stream decoding."""
