"""
Gyeongbokgung Test Suite

Test structure:
- unit/: Test components in isolation
- integration/: Full scripted playthroughs through the controller
- mocks/: Recording implementations of the host contract
"""
