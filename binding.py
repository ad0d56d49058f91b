"""
Layout and binding of date/time fields to a persisted value.

A binding knows the shape of the persisted value, how to decode it into a value
model, where each field goes inside a rectangle and how a single field selection
turns into a new persisted value. Nothing here touches GTK; datetimeentry wraps
bindings in widgets.
"""

import collections, numbers
import calendarvalue, clockvalue

LABEL_WIDTH = 120
LINE_HEIGHT = 18
FIELD_OFFSET = 18
CAPTION_WIDTH = 16
FIELD_GAP = 4

Rect = collections.namedtuple('Rect', 'x y width height')
Slot = collections.namedtuple('Slot', 'caption rect')
Field = collections.namedtuple('Field', 'name caption choices')

def layout(rect, label_width, captions, offset=FIELD_OFFSET, caption_width=0, gap=0, line_height=LINE_HEIGHT):
	# equal cells after the label, left to right, each optionally preceded by a caption
	n = len(captions)
	if n == 0: return []
	cw = caption_width if any(captions) else 0
	free = rect.width - label_width - offset - n*cw - (n-1)*gap
	width = max(free / n, 0)
	height = min(line_height, rect.height) if rect.height > 0 else line_height
	x = rect.x + label_width + offset
	slots = []
	for caption in captions:
		cap = None
		if cw:
			cap = Rect(x, rect.y, cw, height)
			x += cw
		slots.append(Slot(cap, Rect(x, rect.y, width, height)))
		x += width + gap
	return slots

def _is_number(v):
	return isinstance(v, numbers.Real) and not isinstance(v, bool)

def _is_triple(v):
	return isinstance(v, (tuple, list)) and len(v) == 3 and all(_is_number(x) for x in v)

class Binding:
	fields = ()
	caption_width = 0
	gap = 0
	error = 'Unsupported value'

	def check(self, value):
		return None

	def decode(self, value):
		raise NotImplementedError
	def encode(self, model, like):
		raise NotImplementedError

	def current(self, model, name):
		return getattr(model, name)

	def slots(self, rect, label_width=LABEL_WIDTH, line_height=LINE_HEIGHT):
		return layout(rect, label_width, [f.caption for f in self.fields],
			caption_width=self.caption_width, gap=self.gap, line_height=line_height)

	def field(self, name):
		for f in self.fields:
			if f.name == name: return f
		raise ValueError('unknown field %r' % (name,))

	def update(self, model, name, proposed):
		return getattr(model, 'set_' + name)(proposed)

	def apply(self, value, name, proposed):
		choices = [v for v, _ in self.field(name).choices]
		message = self.check(value)
		if message is not None: raise ValueError(message)
		proposed = min(max(int(proposed), min(choices)), max(choices))
		model = self.update(self.decode(value), name, proposed)
		return self.encode(model, value)

	def draw(self, rect, value, label, painter, label_width=LABEL_WIDTH):
		painter.label(Rect(rect.x, rect.y, label_width, rect.height), label)
		message = self.check(value)
		if message is not None:
			painter.help_box(rect, message)
			return value
		model = self.decode(value)
		proposals = []
		for f, slot in zip(self.fields, self.slots(rect, label_width)):
			if slot.caption is not None: painter.label(slot.caption, f.caption)
			cur = self.current(model, f.name)
			new = painter.enum_popup(slot.rect, f.choices, cur)
			if new != cur: proposals.append((f.name, new))
		for name, new in proposals:
			value = self.apply(value, name, new)
		return value

class DateBinding(Binding):
	caption_width = CAPTION_WIDTH
	gap = FIELD_GAP
	error = 'Date only supports 3-component integer fields.'

	_captions = {'day': 'D', 'month': 'M', 'year': 'Y'}
	_choices = {
		'day': calendarvalue.day_choices,
		'month': calendarvalue.month_choices,
		'year': calendarvalue.year_choices,
	}

	def __init__(self, order=calendarvalue.DEFAULT_ORDER):
		if order not in calendarvalue.ORDERS:
			raise ValueError('unknown date field order %r' % (order,))
		self.order = order
		# selectors follow the persisted field order
		self.fields = [Field(name, self._captions[name], self._choices[name]()) for name in calendarvalue.ORDERS[order]]

	def check(self, value):
		return None if _is_triple(value) else self.error

	def decode(self, value):
		return calendarvalue.decode(value, self.order)

	def encode(self, model, like=None):
		return calendarvalue.encode(model, self.order)

	def update(self, model, name, proposed):
		return Binding.update(self, model, name, proposed).validate()

class TimeBinding(Binding):
	error = 'Time only supports 3-component integer or float fields.'

	def __init__(self, ceiling=clockvalue.DAY_CEILING):
		self.ceiling = ceiling
		self.fields = [
			Field('hour', '', clockvalue.hour_choices()),
			Field('minute', '', clockvalue.minute_choices()),
			Field('second', '', clockvalue.second_choices()),
		]

	def check(self, value):
		return None if _is_number(value) or _is_triple(value) else self.error

	def decode(self, value):
		if _is_number(value): return clockvalue.decode_fraction(value)
		return clockvalue.decode_triple(*value)

	def encode(self, model, like):
		if _is_number(like): return clockvalue.encode_fraction(model, self.ceiling)
		return clockvalue.encode_triple(model)
