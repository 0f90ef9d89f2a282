class PriorityQueueError(Exception):
    def __init__(self, error_message: str):
        super().__init__(error_message)

class EmptyQueueError(PriorityQueueError):
    def __init__(self, error_message: str = "PriorityQueue is empty"):
        super().__init__(error_message)

class InvalidHandleError(PriorityQueueError):
    def __init__(self, error_message: str = "node is no longer part of heap"):
        super().__init__(error_message)
