import sys, cairo
from gi.repository import GObject, Gtk, Gdk
import calendarvalue, clockvalue
from binding import Rect, DateBinding, TimeBinding, LABEL_WIDTH, FIELD_OFFSET

HELP_HEIGHT = 28

# Inline error message in place of the field selectors
class HelpBox(Gtk.DrawingArea):

	def __init__(self):
		Gtk.DrawingArea.__init__(self)
		self.set_size_request(-1, HELP_HEIGHT)
		self._message = ''

	def _get_message(self):
		return self._message
	def _set_message(self, message):
		if message != self._message:
			self._message = message
			self.queue_draw()
	message = property(_get_message, _set_message)

	def do_draw(self, cr):
		w = self.get_allocated_width()
		h = self.get_allocated_height()
		cr.set_line_width(1)
		cr.rectangle(.5, .5, w-1, h-1)
		cr.set_source_rgb(1, .87, .85)
		cr.fill_preserve()
		cr.set_source_rgba(.6, 0, 0, .6)
		cr.stroke()
		cr.select_font_face('sans-serif', cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD)
		cr.set_font_size(11)
		xb, yb, tw, th, xa, ya = cr.text_extents(self._message)
		cr.move_to(6-xb, (h-th)/2-yb)
		cr.set_source_rgb(.4, 0, 0)
		cr.show_text(self._message)

GObject.type_register(HelpBox)

class ValueEntry(Gtk.Fixed):

	def __init__(self, binding, label, value, label_width=LABEL_WIDTH):
		Gtk.Fixed.__init__(self)
		self.binding = binding
		self.label_width = label_width
		self._value = None
		self._updating = False
		self._warned = False
		self._label = Gtk.Label(label=label)
		self._label.set_xalign(0)
		self.put(self._label, 0, 0)
		self._captions = []
		self._combos = []
		for field in binding.fields:
			caption = Gtk.Label(label=field.caption)
			combo = Gtk.ComboBoxText()
			for v, text in field.choices:
				combo.append(str(v), text)
			combo.connect('changed', self._on_changed, field)
			for w in (caption, combo):
				w.set_no_show_all(True)
				self.put(w, 0, 0)
			self._captions.append(caption)
			self._combos.append(combo)
		self._help = HelpBox()
		self._help.set_no_show_all(True)
		self.put(self._help, 0, 0)
		self.value = value

	def _get_value(self):
		return self._value
	def _set_value(self, value):
		self._value = value
		message = self.binding.check(value)
		ok = message is None
		self._help.message = message or ''
		self._help.set_visible(not ok)
		for field, caption, combo in zip(self.binding.fields, self._captions, self._combos):
			caption.set_visible(ok and bool(field.caption))
			combo.set_visible(ok)
		if not ok:
			if not self._warned:
				sys.stderr.write('WARNING: %s: %s (got %r)\n' % (self._label.get_text(), message, value))
				self._warned = True
			return
		model = self.binding.decode(value)
		# combos must not feed their own refresh back into apply
		self._updating = True
		try:
			for field, combo in zip(self.binding.fields, self._combos):
				combo.set_active_id(str(self.binding.current(model, field.name)))
		finally:
			self._updating = False
	value = property(_get_value, _set_value)

	def _on_changed(self, combo, field):
		if self._updating: return
		active = combo.get_active_id()
		if active is None: return
		self.value = self.binding.apply(self._value, field.name, int(active))
		self.emit('value-changed')

	def _place(self, widget, rect, allocation):
		if not widget.get_visible(): return
		widget.get_preferred_width()
		widget.get_preferred_height()
		a = Gdk.Rectangle()
		a.x = allocation.x + int(rect.x)
		a.y = allocation.y + int(rect.y)
		a.width = max(int(rect.width), 1)
		a.height = max(int(rect.height), 1)
		widget.size_allocate(a)

	def do_size_allocate(self, allocation):
		self.set_allocation(allocation)
		w, h = allocation.width, allocation.height
		self._place(self._label, Rect(0, 0, self.label_width, h), allocation)
		slots = self.binding.slots(Rect(0, 0, w, h), self.label_width, line_height=h)
		for slot, caption, combo in zip(slots, self._captions, self._combos):
			if slot.caption is not None: self._place(caption, slot.caption, allocation)
			self._place(combo, slot.rect, allocation)
		x = self.label_width + FIELD_OFFSET
		self._place(self._help, Rect(x, 0, w-x, h), allocation)

	def do_get_preferred_width(self):
		minimum = natural = self.label_width + FIELD_OFFSET
		for w in self._captions + self._combos + [self._help]:
			if w.get_visible():
				m, n = w.get_preferred_width()
				minimum += m
				natural += n
		return minimum, natural

	def do_get_preferred_height(self):
		sizes = [w.get_preferred_height() for w in self.get_children() if w.get_visible()]
		return max([m for m, n in sizes] or [0]), max([n for m, n in sizes] or [0])

GObject.type_register(ValueEntry)
GObject.signal_new('value-changed', ValueEntry, GObject.SIGNAL_RUN_LAST | GObject.SIGNAL_ACTION, GObject.TYPE_NONE, ())

class DateEntry(ValueEntry):
	def __init__(self, label, value, order=calendarvalue.DEFAULT_ORDER, label_width=LABEL_WIDTH):
		ValueEntry.__init__(self, DateBinding(order), label, value, label_width)

class TimeEntry(ValueEntry):
	def __init__(self, label, value, ceiling=clockvalue.DAY_CEILING, label_width=LABEL_WIDTH):
		ValueEntry.__init__(self, TimeBinding(ceiling), label, value, label_width)
