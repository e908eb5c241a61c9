# Stamped by build.sh at release time. None means "not stamped".
VERSION = None
COMMIT = None
BUILD_DATE = None
