"""Instance-variable block injection.

The target template carries a block delimited by two comment lines:
    def self.build_metadata
      # begin ivars
      @built_at = ...
      # end ivars
    end

Everything between the markers is regenerated; the marker lines themselves
and anything outside them is preserved untouched.
"""

# Marker constants used by the injector; compared against stripped lines
BEGIN_MARKER = "# begin ivars"
END_MARKER = "# end ivars"

# Leading whitespace of each generated assignment line
IVAR_INDENT = "    "
