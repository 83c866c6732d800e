from speaker_webui.serve import main

main()
