# magicscan — Magic Byte & Digest Signature Scanner
# Finds known file headers/footers and leaked-document digests in raw bytes.
#
# Architecture (bottom → top):
#   signatures     — Compiled-in magic byte table (order = output order)
#   hashlist       — Loader for the "<hex>  <filename>" digest list
#   database       — Immutable static + digest tables, one-time startup init
#   matcher        — Byte reversal + substring containment per table
#   parallel       — Four-way partition fan-out with thread join
#   scanner        — Public entry points (search_data_for_magic_file_bytes)
