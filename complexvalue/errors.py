"""
Error taxonomy for complexvalue.

Only precondition violations raise. Floating-point edge cases (overflow,
division by zero, domain errors) are encoded as NaN/Infinity values instead.

  • NullArgumentError     — a required Complex argument is None
  • InvalidArgumentError  — negative modulus for from_polar, bad root order
"""


class ComplexValueError(Exception):
	def __init__(self, message: str):
		super().__init__(message)
		self.message = message

	def __str__(self):
		return f"{self.__class__.__name__}: {self.message}"


class NullArgumentError(ComplexValueError, TypeError):
	pass


class InvalidArgumentError(ComplexValueError, ValueError):
	pass
