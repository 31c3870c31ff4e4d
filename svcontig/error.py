class InvalidChimericAlignment(Exception):
    """
    raised when two alignment regions cannot be paired into a chimeric alignment, for example
    because they come from different contigs or one reference interval contains the other
    """
    pass


class SerializationError(Exception):
    """
    raised when a binary junction record cannot be decoded
    """
    pass
