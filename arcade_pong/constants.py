# Dimensions
WIDTH, HEIGHT = 1080, 720
PADDLE_WIDTH = 10
PADDLE_HEIGHT = 100
BALL_SIZE = 10

# Speeds
PADDLE_SPEED = 15
BALL_SPEED = 6
BALL_SPEED_X_INITIAL = -6
BALL_SPEED_Y_INITIAL = -6

# AI step range (inclusive)
AI_STEP_MIN = 1
AI_STEP_MAX = 8

# Frame pacing
FPS = 60
FRAME_DELAY_MS = 1000 // FPS

# Colours (RGB tuples)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SCORE_COLOUR = (255, 0, 0)

# Score text
SCORE_FONT_SIZE = 100
SCORE_TEXT_TOP = 20

# Window / audio device
WINDOW_TITLE = "SDL Pong"
MIXER_FREQUENCY = 44100
MIXER_CHANNELS = 2
MIXER_BUFFER = 2048
HIT_SOUND = "hit.wav"
POINT_SOUND = "point.wav"
