"""Frame clock, timers and countdowns."""