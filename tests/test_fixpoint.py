import math
import unittest

from funtools import fix, fix2, fix3
from funtools import recipes

def factorial_body(self, n):
	""" The usual factorial, minus the knowledge of its own name. """
	return 1 if n == 0 else n * self(n - 1)

class FixTests(unittest.TestCase):

	def test_factorial(self):
		fact = fix(factorial_body)
		self.assertEqual(120, fact(5))
		for n in range(11):
			with self.subTest(n=n):
				self.assertEqual(math.factorial(n), fact(n))

	def test_recipe_agrees(self):
		for n in range(11):
			with self.subTest(n=n):
				self.assertEqual(math.factorial(n), recipes.factorial(n))

	def test_base_case_does_not_touch_self(self):
		calls = []
		def body(self, n):
			calls.append(n)
			return "done"
		self.assertEqual("done", fix(body)(0))
		self.assertEqual([0], calls)

	def test_self_is_rewrapped_on_every_call(self):
		selves = []
		def body(self, n):
			selves.append(self)
			return n if n == 0 else self(n - 1)
		outermost = fix(body)
		outermost(3)
		self.assertEqual(4, len(selves))
		self.assertEqual(4, len(set(map(id, selves))))
		self.assertNotIn(outermost, selves)

	def test_keeps_the_name(self):
		fact = fix(factorial_body)
		self.assertEqual("factorial_body", fact.__name__)
		self.assertIn("factorial", fact.__doc__)
		self.assertIs(factorial_body, fact.__wrapped__)

	def test_divergence_is_not_hidden(self):
		forever = fix(lambda self, n: self(n))
		with self.assertRaises(RecursionError):
			forever(0)

	def test_higher_arity_by_bundling(self):
		# Four arguments ride along in one tuple.
		total = fix(lambda self, abcd: sum(abcd) if abcd[0] == 0 else self((abcd[0] - 1, *abcd[1:])) + 1)
		self.assertEqual(10, total((4, 1, 2, 3)))

class Fix2Tests(unittest.TestCase):

	def test_power(self):
		def pow_body(self, base, exp):
			if exp == 0: return 1
			half = self(base, exp // 2)
			return half * half * (base if exp % 2 else 1)
		self.assertEqual(1024, fix2(pow_body)(2, 10))
		for base in range(-3, 4):
			for exp in range(12):
				with self.subTest(base=base, exp=exp):
					self.assertEqual(base ** exp, fix2(pow_body)(base, exp))
					self.assertEqual(base ** exp, recipes.power(base, exp))

	def test_gcd(self):
		gcd = fix2(lambda self, a, b: a if b == 0 else self(b, a % b))
		for a, b in [(0, 0), (12, 18), (17, 5), (1071, 462), (0, 9)]:
			with self.subTest(a=a, b=b):
				self.assertEqual(math.gcd(a, b), gcd(a, b))

	def test_wrong_arity(self):
		add = fix2(lambda self, a, b: a + b)
		with self.assertRaises(TypeError):
			add(1)
		with self.assertRaises(TypeError):
			add(1, 2, 3)

class Fix3Tests(unittest.TestCase):

	def test_accumulating_power(self):
		body = lambda self, base, exp, acc: acc if exp == 0 else self(base, exp - 1, acc * base)
		power = fix3(body)
		self.assertEqual(1, power(7, 0, 1))
		for base in range(5):
			for exp in range(8):
				with self.subTest(base=base, exp=exp):
					self.assertEqual(base ** exp, power(base, exp, 1))

	def test_summation(self):
		for n in range(-2, 50):
			with self.subTest(n=n):
				self.assertEqual(sum(range(n + 1)), recipes.summation(n))

	def test_base_case_does_not_touch_self(self):
		calls = []
		def body(self, a, b, c):
			calls.append((a, b, c))
			return a + b + c
		self.assertEqual(6, fix3(body)(1, 2, 3))
		self.assertEqual([(1, 2, 3)], calls)

if __name__ == '__main__':
	unittest.main()
