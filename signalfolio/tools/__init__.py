# Re-export tool modules so `from signalfolio import tools; tools.market_snapshot...` works.
# yahoo_tool is imported on demand by the source loader.
from . import market_snapshot
from . import risk_alerts
