from bridge.osc import GET_TEMPO, SET_TEMPO, OSCBridge

__all__ = ["GET_TEMPO", "SET_TEMPO", "OSCBridge"]
