# oledarcade

A small arcade console on a simulated 128x64 monochrome OLED screen. The
screen is a one-bit frame buffer laid out in eight pages of 128 columns, with
lines, rectangles, circles, bitmaps and text drawn on it. A joystick (two
axes reading 0 to 1023 and a push button) drives a start menu and a car game.

**Super Car**: steer your car along the road between two lines and avoid the
three oncoming cars. Each car that leaves the bottom of the screen adds a
point to the count (`c=`); the best count so far is the record (`r=`). The
traffic speeds up a little every frame. Touching a car shows `GAME OVER!`,
keeps the record and resets the road. Pressing the button leaves the game.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running from the command line

```
oledarcade [--keys KEYS] [--frames N] [--seed SEED] [--realtime]
```

The command is not interactive. It runs the console on a scripted list of key
presses, one key for each frame shown, stops after a number of frames and
prints the last frame as text (`#` for a lit pixel, `.` for a dark one).

- `--keys`: comma separated keys. `left`/`a`, `right`/`d`, `up`/`w`,
  `down`/`s` move the stick; `button`, `space` or `enter` press the button.
  An empty item means no key for that frame. Unknown keys are an error.
- `--frames`: how many frames to show before stopping (default 200, at
  least 1).
- `--seed`: seed for the random placement of the cars.
- `--realtime`: wait between frames as the device does; without it the run
  is instant.

For example, `oledarcade --keys button,right,right --frames 20` picks the
first menu entry, starts the car game and steers right.

## Using the pieces

- `oledarcade.fonts.Font` holds a bitmap font; `Font.from_bytes` reads a
  font table and `glyph_bytes` returns one character's glyph. The module
  provides `SMALL_FONT`, `TINY_FONT`, `MEDIUM_NUMBERS` and `BIG_NUMBERS`.
- `oledarcade.display.Display` is the frame buffer: `set_pixel`,
  `clear_pixel`, `invert_pixel`, `get_pixel`, `draw_line`, `draw_rect`,
  `draw_round_rect`, `draw_circle`, `draw_bitmap` and their `clear_`
  counterparts, `set_font`, `print_text`, `print_int` and `print_float`.
  `begin` records the controller start-up commands, `update` hands the frame
  to the `on_update` callback and keeps it in `frame`, every controller
  command is kept in `commands`, and `to_text()` renders the screen as text.
- `oledarcade.joystick.classify_position` turns axis readings into a
  `Direction`. `Joystick` reads its axes and button through two callbacks.
  `JoystickHandler.poll` always reports `JoystickPosition.UP`, and
  `position_name` gives a position's name.
- `oledarcade.cargame.CarGame` is the game (`reset`, `step`, `run`) and
  `oledarcade.menu.MainWindow` the menu (`main_window` returns the chosen
  entry 1 to 3, or 0). They take a display, a joystick and, optionally, a
  random source and a sleep function, so they can be run frame by frame.
- `oledarcade.app.KeyboardJoystick` stands in for the stick and button,
  `oledarcade.app.Console` puts everything together, and
  `oledarcade.app.main` is the command above.

## What it does not do

- Only the first menu entry, Super Car, starts a game. The "Pong" and
  "Information:" entries are shown in the menu, but choosing them just
  clears the screen and returns to the menu.
- The command does not read the keyboard live or show a window; input is
  the `--keys` script and output is the last frame printed as text.
- No real display or joystick hardware is driven; the display is only a
  frame buffer in memory.