class InvalidArgumentError(ValueError):
    "raised by _parameter_support_checker: a parameter is out of its support"

class SamplerExhaustedError(RuntimeError):
    "a rejection loop ran more than max_iter times without accepting"
