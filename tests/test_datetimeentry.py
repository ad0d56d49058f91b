import io
import unittest
from unittest import mock

try:
	import gi
	gi.require_version('Gtk', '3.0')
	gi.require_version('Gdk', '3.0')
	from gi.repository import Gtk, Gdk
	HAVE_DISPLAY = Gdk.Display.get_default() is not None
except (ImportError, ValueError):
	HAVE_DISPLAY = False

if HAVE_DISPLAY:
	from binding import DateBinding, TimeBinding
	from datetimeentry import DateEntry, TimeEntry
	from inspector import Inspector


def count_changes(entry):
	changes = []
	entry.connect('value-changed', lambda e: changes.append(e.value))
	return changes


@unittest.skipUnless(HAVE_DISPLAY, 'needs GTK 3 and a display')
class TestValueEntry(unittest.TestCase):
	def test_setting_value_refreshes_without_emitting(self):
		entry = DateEntry('Due', (31, 1, 2023))
		changes = count_changes(entry)
		entry.value = (5, 6, 2001)
		self.assertEqual(changes, [])
		self.assertEqual([c.get_active_id() for c in entry._combos], ['5', '6', '2001'])
		self.assertEqual(entry.value, (5, 6, 2001))

	def test_selection_applies_clamp_and_emits_once(self):
		entry = DateEntry('Due', (31, 1, 2023))
		changes = count_changes(entry)
		entry._combos[1].set_active_id('2')
		self.assertEqual(changes, [(28, 2, 2023)])
		self.assertEqual(entry._combos[0].get_active_id(), '28')

	def test_float_time_selection(self):
		entry = TimeEntry('Starts', 13.5)
		changes = count_changes(entry)
		entry._combos[1].set_active_id('45')
		self.assertEqual(changes, [13.75])

	def test_shape_mismatch_shows_help_and_warns_once(self):
		with mock.patch('sys.stderr', new_callable=io.StringIO) as err:
			entry = TimeEntry('Location', 'Town hall')
			entry.value = 'Still wrong'
		self.assertEqual(err.getvalue().count('WARNING'), 1)
		self.assertIn(TimeBinding.error, err.getvalue())
		self.assertTrue(entry._help.get_visible())
		self.assertEqual(entry._help.message, TimeBinding.error)
		self.assertFalse(any(c.get_visible() for c in entry._combos))

	def test_recovers_from_mismatch(self):
		with mock.patch('sys.stderr', new_callable=io.StringIO):
			entry = TimeEntry('Alarm', None)
		entry.value = (7, 30, 0)
		self.assertFalse(entry._help.get_visible())
		self.assertTrue(all(c.get_visible() for c in entry._combos))


@unittest.skipUnless(HAVE_DISPLAY, 'needs GTK 3 and a display')
class TestInspector(unittest.TestCase):
	def test_selection_writes_back_to_target(self):
		class Event:
			date = (31, 1, 2023)
			alarm = (7, 30, 0)
		event = Event()
		inspector = Inspector(event, [('date', DateBinding()), ('alarm', TimeBinding())])
		names = []
		inspector.connect('changed', lambda i, name: names.append(name))
		inspector.entries['date']._combos[1].set_active_id('2')
		self.assertEqual(event.date, (28, 2, 2023))
		self.assertEqual(names, ['date'])

	def test_refresh_rereads_target(self):
		class Event:
			alarm = (7, 30, 0)
		event = Event()
		inspector = Inspector(event, [('alarm', TimeBinding())])
		event.alarm = (9, 0, 0)
		inspector.refresh()
		self.assertEqual(inspector.entries['alarm'].value, (9, 0, 0))


if __name__ == "__main__":
	unittest.main(verbosity=2)
