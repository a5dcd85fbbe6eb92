from bridge.osc import OSCBridge


class LiveTools:
    def __init__(self, bridge: OSCBridge):
        self.bridge = bridge

    async def get_song_tempo(self) -> str:
        tempo = await self.bridge.get_tempo()
        return f"Song tempo is {tempo:g} BPM"

    async def set_song_tempo(self, bpm: float) -> str:
        reply = await self.bridge.set_tempo(bpm)
        if reply:
            return f"Set song tempo to {float(reply[0]):g} BPM"
        return f"Set song tempo to {float(bpm):g} BPM"
