import math

SECONDS_PER_DAY = 24 * 60 * 60
LAST_SECOND = SECONDS_PER_DAY - 1

# fractional-hours ceilings
DAY_CEILING = 23.999722 # 23:59:59, never rolls over to the next day
FULL_DAY = 24.0

# stored fractions within this many seconds below a whole second decode to it
SNAP = .01

def clamp(v, lo, hi):
	return min(max(v, lo), hi)

class ClockValue:
	def __init__(self, hour=0, minute=0, second=0):
		self.hour = hour
		self.minute = minute
		self.second = second

	def set_hour(self, hour):
		self.hour = hour
		return self
	def set_minute(self, minute):
		self.minute = minute
		return self
	def set_second(self, second):
		self.second = second
		return self

	def __eq__(self, other):
		return isinstance(other, ClockValue) and (self.hour, self.minute, self.second) == (other.hour, other.minute, other.second)
	def __repr__(self):
		return 'ClockValue(%i, %i, %i)' % (self.hour, self.minute, self.second)
	def __str__(self):
		return '%02i:%02i:%02i' % (self.hour, self.minute, self.second)

def _component(v, hi):
	if math.isnan(v): return 0
	return int(clamp(v, 0, hi))

def decode_triple(hour, minute, second):
	return ClockValue(_component(hour, 23), _component(minute, 59), _component(second, 59))

def decode_fraction(v):
	if math.isnan(v): v = 0
	v = clamp(v, 0, 24)
	total = clamp(math.floor(v * 3600 + SNAP), 0, LAST_SECOND)
	return ClockValue(total // 3600, total % 3600 // 60, total % 60)

def encode_triple(value):
	return value.hour, value.minute, value.second

def encode_fraction(value, ceiling=DAY_CEILING):
	v = value.hour + value.minute/60 + value.second/3600
	return clamp(v, 0., ceiling)

def hour_choices():
	return [(h, '%02i' % h) for h in range(24)]

def minute_choices():
	return [(m, '%02i' % m) for m in range(60)]

second_choices = minute_choices
