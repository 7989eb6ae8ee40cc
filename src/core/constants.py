"""
Core constants and defaults.

Defines the simulator's accounting constants and the default parameter set
of every strategy.
"""

# Simulator accounting
DEFAULT_INITIAL_BALANCE = 10000.0
MIN_TRADE_BALANCE = 100.0  # Cash required before a BUY is accepted
INVESTMENT_FRACTION = 0.95  # Share of cash moved into the position on BUY
MIN_EXECUTION_CONFIDENCE = 0.1  # Signals at or below this are ignored
DEFAULT_START_INDEX = 20  # Used when a strategy exposes no long_period
PROGRESS_LOG_INTERVAL = 200  # Candles between progress log lines

# Confidence ceiling
MAX_SIGNAL_CONFIDENCE = 0.9  # Ceiling for computed (non-tiered) confidences

# Moving average crossover
MAC_SHORT_PERIOD = 10
MAC_LONG_PERIOD = 50
MAC_CONFIDENCE_FLOOR = 0.5
MAC_SPREAD_SCALE = 50.0

# RSI
RSI_PERIOD = 14
RSI_OVERSOLD = 30.0
RSI_OVERBOUGHT = 70.0
RSI_NEUTRAL = 50.0  # Reported when there is too little history
RSI_MAX = 100.0
RSI_DEPTH_ANCHOR_LOW = 20.0
RSI_DEPTH_ANCHOR_HIGH = 80.0
RSI_DEPTH_SCALE = 20.0

# Bollinger bands
BB_PERIOD = 20
BB_STANDARD_DEVIATIONS = 2.0
BB_DISTANCE_SCALE = 10.0

# MACD
MACD_FAST_PERIOD = 12
MACD_SLOW_PERIOD = 26
MACD_SIGNAL_PERIOD = 9
MACD_WARMUP_PADDING = 5
MACD_CONFIDENCE_STRONG = 0.8
MACD_CONFIDENCE_MEDIUM = 0.6
MACD_CONFIDENCE_WEAK = 0.4

# RSI + MA combo
COMBO_RSI_PERIOD = 14
COMBO_RSI_OVERSOLD = 30.0
COMBO_RSI_OVERBOUGHT = 70.0
COMBO_MA_SHORT_PERIOD = 10
COMBO_MA_LONG_PERIOD = 20
COMBO_WARMUP_PADDING = 5
COMBO_TREND_STRENGTH_THRESHOLD = 0.001  # 0.1%
COMBO_WEAK_BUY_RSI_CEILING = 60.0
COMBO_WEAK_SELL_RSI_FLOOR = 40.0
COMBO_CONFIDENCE_STRONG = 0.9
COMBO_CONFIDENCE_MEDIUM = 0.7
COMBO_CONFIDENCE_WEAK = 0.5

# Scalping
SCALP_SPREAD_THRESHOLD = 0.02
SCALP_VOLUME_THRESHOLD = 1.5
SCALP_QUICK_PROFIT_TARGET = 0.15  # Percent
SCALP_MAX_HOLD_TIME = 5  # Candles
SCALP_VOLATILITY_PERIOD = 10
SCALP_MIN_VOLATILITY = 0.1
SCALP_WARMUP_PADDING = 5
SCALP_VOLUME_AVERAGE_PERIOD = 20
SCALP_MOMENTUM_WINDOW = 3
SCALP_INSTANT_MOVE_THRESHOLD = 0.0003  # 0.03%
SCALP_VOLUME_BOOST = 1.1  # Volume bump versus the previous candle
SCALP_PRICE_ACTION_THRESHOLD = 0.0001
SCALP_MOMENTUM_STRENGTH_THRESHOLD = 0.2
SCALP_PROFIT_TAKE_FRACTION = 0.5  # Exit at half the profit target
SCALP_STOP_LOSS_MULTIPLE = 2.0
SCALP_MIN_CANDLES_BEFORE_REVERSAL_EXIT = 2
SCALP_TRADE_LEDGER_WINDOW_SECONDS = 3600
SCALP_CONFIDENCE_QUICK_PROFIT = 0.9
SCALP_CONFIDENCE_MAX_HOLD = 0.7
SCALP_CONFIDENCE_REVERSAL = 0.8
SCALP_CONFIDENCE_STOP_LOSS = 0.8
SCALP_CONFIDENCE_INSTANT = 0.8
SCALP_CONFIDENCE_AGGRESSIVE = 0.7
