"""Tests for NMEA checksum calculation and validation."""

from pigps import compute_checksum, is_valid

RMC_VALID = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
GSA_VALID = "$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39"
GSV_VALID = "$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75"
GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"


class TestComputeChecksum:
    """Tests for compute_checksum function."""

    def test_reproduces_rmc_trailer(self):
        assert compute_checksum(RMC_VALID) == "6A"

    def test_reproduces_gsa_trailer(self):
        assert compute_checksum(GSA_VALID) == "39"

    def test_reproduces_gsv_trailer(self):
        assert compute_checksum(GSV_VALID) == "75"

    def test_reproduces_multi_constellation_trailer(self):
        assert compute_checksum(GGA_VALID) == "7F"

    def test_body_without_trailer(self):
        assert compute_checksum(RMC_VALID.split("*")[0]) == "6A"

    def test_empty_body_is_zero(self):
        assert compute_checksum("$*") == "00"
        assert compute_checksum("") == "00"

    def test_uppercase_two_digits(self):
        # "$A" -> 0x41, single character keeps its own value
        assert compute_checksum("$A*") == "41"
        # "$\x01" pads to two digits
        assert compute_checksum("$\x01*") == "01"

    def test_stops_at_first_asterisk(self):
        assert compute_checksum("$GPGSA*39*FF") == compute_checksum("$GPGSA*")

    def test_constructed_sentence_round_trips(self):
        body = "$GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E"
        sentence = f"{body}*{compute_checksum(body)}"
        assert is_valid(sentence) is True


class TestIsValid:
    """Tests for is_valid function."""

    def test_valid_rmc(self):
        assert is_valid(RMC_VALID) is True

    def test_valid_gsa(self):
        assert is_valid(GSA_VALID) is True

    def test_wrong_checksum(self):
        assert is_valid(RMC_VALID[:-2] + "FF") is False

    def test_lowercase_hex_is_rejected(self):
        assert is_valid(RMC_VALID[:-2] + "6a") is False

    def test_missing_asterisk(self):
        assert is_valid(RMC_VALID.replace("*", "")) is False

    def test_truncated_checksum(self):
        assert is_valid(RMC_VALID[:-1]) is False

    def test_empty_string(self):
        assert is_valid("") is False

    def test_trailing_terminator_is_not_stripped(self):
        assert is_valid(RMC_VALID + "\r\n") is False

    def test_corrupted_body(self):
        assert is_valid(RMC_VALID.replace("022.4", "023.4")) is False
