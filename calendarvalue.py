import datetime, math

MIN_YEAR = 1900
MAX_YEAR = 2100
DEFAULT_YEAR = 1975

MONTH_NAMES = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']
LONG_MONTHS = frozenset([1, 3, 5, 7, 8, 10, 12])
SHORT_MONTHS = frozenset([4, 6, 9, 11])
FEB = 2

# field order of the persisted tuple
ORDERS = {
	'dmy': ('day', 'month', 'year'),
	'ymd': ('year', 'month', 'day'),
}
DEFAULT_ORDER = 'dmy'

def clamp(v, lo, hi):
	return min(max(v, lo), hi)

def is_leap_year(year):
	return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def max_day(month, year):
	if month in LONG_MONTHS: return 31
	if month in SHORT_MONTHS: return 30
	if month == FEB: return 29 if is_leap_year(year) else 28
	return 31

class CalendarValue:
	def __init__(self, year=DEFAULT_YEAR, month=1, day=1):
		self.year = year
		self.month = month
		self.day = day

	def set_year(self, year):
		self.year = year
		return self
	def set_month(self, month):
		self.month = month
		return self
	def set_day(self, day):
		self.day = day
		return self

	def validate(self):
		last = max_day(self.month, self.year)
		if self.day > last: self.day = last
		return self

	def to_date(self):
		return datetime.date(self.year, self.month, self.day)

	def __eq__(self, other):
		return isinstance(other, CalendarValue) and (self.year, self.month, self.day) == (other.year, other.month, other.day)
	def __repr__(self):
		return 'CalendarValue(%i, %i, %i)' % (self.year, self.month, self.day)
	def __str__(self):
		return '%04i-%02i-%02i' % (self.year, self.month, self.day)

def _fields(order):
	try:
		return ORDERS[order]
	except KeyError:
		raise ValueError('unknown date field order %r' % (order,)) from None

def _component(v, lo, hi, unset):
	# zero and nan mean unset, infinities pin to the range ends
	if math.isnan(v): v = 0
	elif math.isinf(v): v = hi if v > 0 else lo
	return clamp(int(v) or unset, lo, hi)

def decode(values, order=DEFAULT_ORDER):
	raw = dict(zip(_fields(order), values))
	return CalendarValue(
		_component(raw['year'], MIN_YEAR, MAX_YEAR, DEFAULT_YEAR),
		_component(raw['month'], 1, 12, 1),
		_component(raw['day'], 1, 31, 1),
	).validate()

def encode(value, order=DEFAULT_ORDER):
	return tuple(getattr(value, name) for name in _fields(order))

def year_choices():
	return [(y, str(y)) for y in range(MAX_YEAR, MIN_YEAR-1, -1)]

def month_choices():
	return [(i+1, name) for i, name in enumerate(MONTH_NAMES)]

def day_choices():
	return [(d, str(d)) for d in range(1, 32)]
