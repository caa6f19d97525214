import logging


def initialize_log(logging_level: str | int):
    """
    Python custom logging initialization

    Current timestamp is added to every line so command output can be
    correlated with other logs
    """
    logging.basicConfig(
        format='%(asctime)s %(levelname)-8s %(message)s',
        level=logging_level,
        datefmt='%Y-%m-%d %H:%M:%S',
    )
