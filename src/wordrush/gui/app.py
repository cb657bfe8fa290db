"""
Word Rush Kivy Application

Main window with:
- WPM and typed-count stats bar
- Numbered list of the words currently on screen
- Text input checked on every keystroke
"""

import logging

from kivy.app import App
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.label import Label
from kivy.uix.textinput import TextInput
from kivy.clock import Clock
from kivy.properties import NumericProperty

from ..config import TrainerConfig
from ..session import TrainerSession
from ..wordlist import DEFAULT_WORDS, load_words

logger = logging.getLogger(__name__)


class TrainerStats(BoxLayout):
    """Elapsed time, WPM and typed-count display"""

    elapsed_time = NumericProperty(0)
    wpm = NumericProperty(0)
    typed_count = NumericProperty(0)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'horizontal'
        self.size_hint_y = None
        self.height = 40
        self.padding = 10
        self.spacing = 20

        self.time_label = Label(text='Time: 00:00', halign='left')
        self.time_label.bind(size=self.time_label.setter('text_size'))
        self.wpm_label = Label(text='WPM: 0.0', halign='center')
        self.count_label = Label(text='Typed Count: 0', halign='right')
        self.count_label.bind(size=self.count_label.setter('text_size'))

        self.add_widget(self.time_label)
        self.add_widget(self.wpm_label)
        self.add_widget(self.count_label)

        self.bind(
            elapsed_time=self._update_labels,
            wpm=self._update_labels,
            typed_count=self._update_labels
        )

    def _update_labels(self, *args):
        mins = int(self.elapsed_time) // 60
        secs = int(self.elapsed_time) % 60
        self.time_label.text = f'Time: {mins:02d}:{secs:02d}'
        self.wpm_label.text = f'WPM: {self.wpm:.1f}'
        self.count_label.text = f'Typed Count: {self.typed_count}'


class WordListView(BoxLayout):
    """One label per window slot, in display order"""

    def __init__(self, size: int, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'vertical'
        self.spacing = 4
        self._labels = []
        for _ in range(size):
            label = Label(text='', font_size='20sp', halign='left')
            label.bind(size=label.setter('text_size'))
            self._labels.append(label)
            self.add_widget(label)

    def set_words(self, words):
        for i, (label, word) in enumerate(zip(self._labels, words), 1):
            label.text = f'{i}. {word}'


class TrainerLayout(BoxLayout):
    """Main application layout"""

    def __init__(self, session: TrainerSession, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'vertical'
        self.padding = 16
        self.spacing = 8

        self.session = session
        self._tick_event = None

        self.stats = TrainerStats()
        self.word_list = WordListView(session.config.window_size)
        self.input = TextInput(
            hint_text='Type the word here',
            multiline=False,
            size_hint_y=None,
            height=48,
            font_size='18sp'
        )
        self.input.bind(text=self._on_text)

        self.add_widget(self.stats)
        self.add_widget(self.word_list)
        self.add_widget(self.input)

    def start(self):
        """Start the session and the periodic tick"""
        self.session.start()
        self._refresh()
        interval = self.session.config.tick_millis / 1000.0
        self._tick_event = Clock.schedule_interval(self._on_tick, interval)
        self.input.focus = True

    def stop(self):
        if self._tick_event:
            self._tick_event.cancel()
            self._tick_event = None

    def _on_tick(self, dt):
        self.session.tick()
        self._refresh()

    def _on_text(self, instance, value):
        """Check the field on every change; clear it on a match"""
        if not self.session.is_running:
            return
        if self.session.type_text(value):
            self.input.text = self.session.input_text
            self._refresh()

    def _refresh(self):
        snap = self.session.snapshot()
        self.word_list.set_words(snap.words)
        self.stats.elapsed_time = snap.elapsed_millis / 1000.0
        self.stats.wpm = snap.wpm
        self.stats.typed_count = snap.typed_count


class WordRushApp(App):
    """Main application class"""

    def __init__(self, config: TrainerConfig = None, **kwargs):
        super().__init__(**kwargs)
        self.trainer_config = config or TrainerConfig.load()

    def build(self):
        self.title = 'Word Rush'
        path = self.trainer_config.words_path
        words = load_words(path) if path else list(DEFAULT_WORDS)
        logger.info("Loaded %d words from %s", len(words), path or 'built-in list')
        layout = TrainerLayout(TrainerSession(words, config=self.trainer_config))
        layout.start()
        return layout

    def on_stop(self):
        """Cancel the tick on exit"""
        if self.root:
            self.root.stop()


def main(config: TrainerConfig = None):
    WordRushApp(config).run()


if __name__ == '__main__':
    main()
