#!/usr/bin/python3

import gi
gi.require_version('Gtk', '3.0')
from gi.repository import GObject, Gtk
from binding import LABEL_WIDTH
from datetimeentry import ValueEntry

# Edits attributes of a host object, one entry per (attribute name, binding)
class Inspector(Gtk.VBox):

	def __init__(self, target, fields, label_width=LABEL_WIDTH):
		Gtk.VBox.__init__(self)
		self.set_spacing(4)
		self.target = target
		self.entries = {}
		for name, binding in fields:
			entry = ValueEntry(binding, name.replace('_', ' ').capitalize(), getattr(target, name), label_width)
			entry.connect('value-changed', self._on_value_changed, name)
			self.pack_start(entry, False, True, 0)
			self.entries[name] = entry

	def _on_value_changed(self, entry, name):
		setattr(self.target, name, entry.value)
		self.emit('changed', name)

	def refresh(self):
		for name, entry in self.entries.items():
			entry.value = getattr(self.target, name)

GObject.type_register(Inspector)
GObject.signal_new('changed', Inspector, GObject.SIGNAL_RUN_LAST, GObject.TYPE_NONE, (str,))

if __name__ == '__main__':
	from binding import DateBinding, TimeBinding
	import datetime, calendarvalue, clockvalue

	class Event:
		def __init__(self):
			self.date = (31, 1, 2023)
			self.release_date = (2024, 2, 29)
			self.starts_at = 13.5
			self.alarm = (7, 30, 0)
			self.ends_at = 23.999722
			self.location = 'Town hall'

	event = Event()
	inspector = Inspector(event, [
		('date', DateBinding()),
		('release_date', DateBinding('ymd')),
		('starts_at', TimeBinding()),
		('alarm', TimeBinding()),
		('ends_at', TimeBinding(clockvalue.FULL_DAY)),
		('location', TimeBinding()),
	])

	def on_changed(inspector, name):
		value = getattr(event, name)
		model = inspector.entries[name].binding.decode(value)
		if isinstance(model, calendarvalue.CalendarValue):
			print('%s = %r (%s, %s)' % (name, value, model, model.to_date().strftime('%A')))
		else:
			print('%s = %r (%s)' % (name, value, model))
	inspector.connect('changed', on_changed)

	def on_today(button):
		today = datetime.date.today()
		event.date = calendarvalue.encode(calendarvalue.CalendarValue(today.year, today.month, today.day))
		inspector.refresh()
		on_changed(inspector, 'date')
	tb_today = Gtk.Button(label='Today')
	tb_today.connect('clicked', on_today)

	win = Gtk.Window()
	win.set_title('Inspector')
	win.set_default_size(560, 0)
	win.connect('destroy', Gtk.main_quit)
	win.set_position(Gtk.WindowPosition.CENTER)
	v = Gtk.VBox()
	v.set_border_width(8)
	v.set_spacing(8)
	v.pack_start(inspector, False, True, 0)
	v.pack_start(tb_today, False, False, 0)
	win.add(v)
	win.show_all()

	Gtk.main()
